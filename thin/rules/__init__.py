"""Lint rules, their shared types, and the rule registry."""