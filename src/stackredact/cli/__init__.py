"""stackredact command-line interface."""
