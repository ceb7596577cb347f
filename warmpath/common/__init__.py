"""Shared configuration, logging, errors, profile types and reference data."""
