"""calcsuite — arithmetic, an accumulator calculator and ASCII text helpers.

Ships a self-check driver that exercises every component with fixed inputs
and reports pass/fail lines, a summary, and an exit status.

Usage:
    python -m calcsuite                          # Run the self-check suite
    python -m calcsuite run --output out.json    # Run and save results
    python -m calcsuite list                     # Show the fixed checks
    python -m calcsuite calc divide 10 0         # One arithmetic function
    python -m calcsuite text reverse hello       # One string transform
    python -m calcsuite accumulate add:10.5 multiply:2
"""
