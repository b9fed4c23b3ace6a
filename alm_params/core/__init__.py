"""ALM Params core utilities: settings, logging, errors and shared types."""
