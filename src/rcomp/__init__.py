"""Front half of a compiler for a small let/arithmetic language.

Pipeline: source -> Parser -> partial_eval -> uniquify -> flatten.
"""

__version__ = "0.1.0"
