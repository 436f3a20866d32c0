"""Bookings app package.

This app encapsulates the hourly booking engine: clock parsing, slot
generation, conflict detection, the booking lifecycle and the
availability query. Double bookings are prevented by the in-application
conflict check and, under concurrency, by a partial unique constraint
at the database level.
"""
