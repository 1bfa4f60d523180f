"""Release decision core.

- semver: version parsing, formatting and bump rules
- classify: commit subject -> changelog category
- changelog: grouped, deterministic changelog document
- version: next-version computation over a source-control gateway
- summary: release report and console recap

Everything here is pure apart from the gateway reads in ``version``; nothing
here writes output or reads the environment.
"""

from __future__ import annotations
