"""Break-even growth rate calculator for retirement withdrawals."""
