"""HTTP façade over bibmarkup conversions."""
