"""Grade target checker: what score is needed on the remaining assessment."""
