"""Units, durations, clocks and the timing primitive."""
