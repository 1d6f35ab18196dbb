"""Output sink: Rich/JSON rendering of service results."""
