"""Services for featmatrix."""
