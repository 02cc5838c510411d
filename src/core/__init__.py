"""Core: domain models, contracts, settings and the build pipeline."""
