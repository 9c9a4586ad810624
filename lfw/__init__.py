"""lint-failure-wrangler: CI lint glue for GitHub sub-issues and EditorConfig checks."""
