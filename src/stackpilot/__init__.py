"""stackpilot - CloudFormation stack creation with parent-stack parameter imports."""

__version__ = "0.1.0"
