"""Process-level infrastructure: paths, env config, logging."""
