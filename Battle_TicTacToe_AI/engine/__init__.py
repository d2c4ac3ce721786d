"""Board rules: line extraction, win detection, move validation, errors."""
