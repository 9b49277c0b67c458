#!/usr/bin/env python3
"""
richhdr CLI package: commands, display and input validation
"""
