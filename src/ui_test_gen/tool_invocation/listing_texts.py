"""Fixed help texts returned by the listing operations."""

from __future__ import annotations

OPERATIONS_LISTING = """\
## 🛠️ AVAILABLE TOOLS

- To generate Playwright UI tests: use `Tool 1` or call `generateVisualTests` with `csvData`
- To see available tools: use `Tool 2` or call `listTools`
- To see example Playwright commands: use `Tool 3` or call `listCommands`
"""

COMMANDS_LISTING = """\
## 🛠️ AVAILABLE COMMANDS

- `npx playwright test tests/ui/pdp.spec.ts --update-snapshots` - Update snapshots for one test file
- `npx playwright test tests/ui/pdp.spec.ts --grep "PdpFullPage" --update-snapshots` - Update snapshots for one test
- `npx playwright test --grep "@visual-regression-tag" --update-snapshots` - Update snapshots for all visual tests

- `ENV=int npx playwright test tests/ui/pdp.spec.ts --grep "PdpFullPage" --update-snapshots` - One test in one environment
- `ENV=int npx playwright test tests/ui/pdp.spec.ts --update-snapshots` - One test file in one environment
- `ENV=int npx playwright test --grep "@visual-regression-tag" --update-snapshots` - All visual tests in one environment
- `ENV=int npx playwright test --grep "@fullpage-tag" --update-snapshots` - Full-page visual tests only, in one environment
- `ENV=int npx playwright test --grep "@section-tag" --update-snapshots` - Section visual tests only, in one environment
"""
