# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
aocrun selection-and-execution harness.

Subsystems:
  - models: solution entries and timed results
  - registry: the static (year, day) -> solutions table
  - selection: command-line parsing into SelectionCriteria
  - runner: filtering, input acquisition and timed execution
  - reporting: the results table
"""
