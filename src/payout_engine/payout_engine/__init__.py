"""Payout Engine package.

Feature modules (periods, attendance, deliverables, jobs, payouts) each keep a
small domain model, a repository Protocol with its MySQL adapter, and the pure
logic that turns recorded facts into payout rows.
"""
