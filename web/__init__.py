"""
Web front end for hoopstats.
"""
