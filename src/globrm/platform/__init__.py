"""Platform services (logging, filesystem) used by globrm features."""
