"""
Provider plugins shipped with the launcher.
"""
