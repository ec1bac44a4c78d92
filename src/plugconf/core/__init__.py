"""plugconf core library: extension directives, properties loading and configuration."""
