"""Application package for the sentence practice backend.

This package exposes the service, repository and model modules used by
the FastAPI application. Practice sentences are managed here directly;
word sentences belong to the vocabulary subsystem and are only read.
"""
