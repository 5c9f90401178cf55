# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""Conversion of Cregeen's Manx dictionary from HTML to JSON."""
