"""
Routes HTTP du depot Media Time.
"""
