"""Validation helpers for human-entered dates and PNC reference codes.

The package is split into two independent cores:

* :mod:`formcheck.dates` turns free-text day/month/year fields into verified
  :class:`datetime.date` values and describes the span between two of them.
* :mod:`formcheck.pnc` generates and validates checksum-bearing PNC codes.

The command line interface lives in :mod:`formcheck.cli`.
"""

__version__ = "0.1.0"
