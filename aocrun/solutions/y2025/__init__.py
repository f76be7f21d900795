# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Advent of Code 2025."""
