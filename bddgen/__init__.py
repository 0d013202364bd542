"""bddgen - turns Given/When/Then feature files into Playwright test skeletons"""

__version__ = "1.0.0"
