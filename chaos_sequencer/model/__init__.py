"""Dynamics models, regime definitions and step records."""
