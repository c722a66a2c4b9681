# ---------------------------------------------------------------------------
# File: __init__.py
# ---------------------------------------------------------------------------
# Description:
#	pyleader: leader-key dispatch core (key codes -> action tree -> actions).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/05/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

__version__ = "0.1.0"
