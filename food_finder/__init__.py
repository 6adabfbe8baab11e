"""Food Finder - a small restaurant guide backed by a flat text file."""
