"""Uniform random providers feeding the generator."""
