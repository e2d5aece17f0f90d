"""
Constants for the student finance calculators.

Federal figures are for the 2024 poverty guidelines (48 contiguous
states).  Plot defaults describe the graphing calculator's initial view.
"""

# ── Income-driven repayment ──────────────────────────────────────────
POVERTY_GUIDELINE_BASE = 15_060        # household of one
POVERTY_GUIDELINE_PER_PERSON = 5_380   # each additional member
DISCRETIONARY_MULTIPLIER = 1.5         # income above 150% of guideline

# Share of discretionary income paid per year, by plan.
IDR_PLAN_RATES = {
    "SAVE": 0.05,
    "PAYE": 0.10,
    "REPAYE": 0.10,
    "IBR": 0.10,
    "ICR": 0.20,
}
IDR_PLAN_NAMES = {
    "SAVE": "Saving on a Valuable Education",
    "PAYE": "Pay As You Earn",
    "REPAYE": "Revised Pay As You Earn",
    "IBR": "Income-Based Repayment",
    "ICR": "Income-Contingent Repayment",
}
ICR_FIXED_TERM_MONTHS = 144            # 12-year standard amortisation cap

US_STATES = [
    "AL", "AK", "AZ", "AR", "CA", "CO", "CT", "DE", "DC", "FL", "GA",
    "HI", "ID", "IL", "IN", "IA", "KS", "KY", "LA", "ME", "MD", "MA",
    "MI", "MN", "MS", "MO", "MT", "NE", "NV", "NH", "NJ", "NM", "NY",
    "NC", "ND", "OH", "OK", "OR", "PA", "RI", "SC", "SD", "TN", "TX",
    "UT", "VT", "VA", "WA", "WV", "WI", "WY",
]

# ── Graphing calculator ──────────────────────────────────────────────
DEFAULT_X_RANGE = (-10.0, 10.0)
DEFAULT_Y_RANGE = (-10.0, 10.0)
ZOOM_FACTOR = 0.25         # zoom-out widens each span by this share
PAN_FRACTION = 0.10        # arrow buttons move the window by 10%
MIN_SPAN = 1e-6            # zoom-in never shrinks an axis below this
DEFAULT_RESOLUTION = 600   # samples per plot (canvas width in px)
TABLE_STEPS = 20
TABLE_DECIMALS = 2
VARIABLE = "x"
MAX_NESTING = 100          # parentheses, signs and exponents deep

# ── Scientific calculator ────────────────────────────────────────────
RESULT_DECIMALS = 10       # results are rounded to this many places
HISTORY_LIMIT = 10         # calculations kept on screen
FACTORIAL_LIMIT = 170      # 171! overflows a float

# ── Web app ──────────────────────────────────────────────────────────
HOST = "127.0.0.1"
PORT = 5000
