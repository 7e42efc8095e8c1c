"""
Interface web FastAPI du depot Media Time.
"""
