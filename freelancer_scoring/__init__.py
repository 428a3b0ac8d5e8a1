"""Scoring and matching engine for a freelance translator network."""
