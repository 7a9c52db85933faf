"""Registry of supported policy types and their default IaC settings."""