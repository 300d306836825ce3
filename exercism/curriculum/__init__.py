"""Curriculum module: exercises and per-language slug lists.

Resolves a submitted file path such as ``two/two.rb`` to the Exercise it
targets by consulting the registered language curricula.
"""
