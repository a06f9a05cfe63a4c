# SPDX-License-Identifier: Apache-2.0

"""
Contact API - lead capture for the law office landing page.
"""

__version__ = "1.0.0"
