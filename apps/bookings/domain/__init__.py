"""Pure booking rules: clock parsing, slot generation and conflict detection."""
