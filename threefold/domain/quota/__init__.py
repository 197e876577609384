"""Usage quota domain: sliding-window admission per identity."""
