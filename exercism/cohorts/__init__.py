"""Cohorts module: peers and managers derived from team membership."""
