"""Undercover - a pass-the-phone word party game."""
