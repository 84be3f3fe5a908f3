"""Pure codecs and numeric conversions."""
