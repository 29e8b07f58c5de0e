"""plotdata: shape inference for heterogeneous delimited text and JSON tables."""
