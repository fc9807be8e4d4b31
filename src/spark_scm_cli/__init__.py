"""spark-scm command line interface."""
