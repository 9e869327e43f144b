"""User interfaces for globrm."""
