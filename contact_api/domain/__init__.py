# SPDX-License-Identifier: Apache-2.0

"""
Domain logic package for the contact form.

This package contains pure business logic functions with no side effects:
document checksums, field rules and submission helpers.
"""
