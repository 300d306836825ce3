"""Submissions module: attempts and the submission lifecycle.

An Attempt resolves which exercise a piece of code targets, compares it with
the user's latest submission for that exercise, and on save supersedes the
previous current submission while recording the new one as pending.
"""
