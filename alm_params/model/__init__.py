"""ALM Params configuration model: record, enums, bounds, curves and rules."""
