"""Core building blocks of the gpsoauth client."""
