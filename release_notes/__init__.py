'''
Ticket Release Notes

Generates release notes for a release-branch from a text-template. Ticket-IDs (e.g. `PROJ-123`)
are extracted from the subject-lines of all commits contained in the release-branch, but not in
the base-branch, and passed to the template (along with the release-version and arbitrary
caller-supplied template-data). The rendered result is written to a file, which is then committed
and pushed back to the release-branch.

Committing and pushing is done on a best-effort basis: errors are reported as warnings, but do not
fail the run. If the template file does not exist, no release notes are generated (this is not
considered an error).
'''
