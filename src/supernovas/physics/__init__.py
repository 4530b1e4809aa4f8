"""Physical constants and the time-keeping algorithms built on them."""
