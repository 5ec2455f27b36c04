"""List Azure storage accounts, read their properties and manage their resource tags through Azure Resource Manager."""

__version__ = "0.1.0"