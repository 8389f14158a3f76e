"""
Shared pytest setup for the Drush tests
"""
import os
import sys

# Add parent directory to path so the tests run from a plain checkout
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))
