"""Hotel listing API gated by enrollment and ticket payment rules."""
