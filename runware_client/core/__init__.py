"""Core building blocks: exceptions, logging, schemas and providers."""
