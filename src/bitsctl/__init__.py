"""bitsctl — decode and evaluate BITS transmissions."""

__version__ = "0.1.0"
