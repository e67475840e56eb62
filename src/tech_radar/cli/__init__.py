"""tech-radar command line interface (``tech-radar``)."""
