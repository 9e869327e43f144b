"""Feature packages implementing the resolve, delete, report pipeline."""
