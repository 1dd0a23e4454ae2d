"""tsinit -- create a new project from a TypeScript template repository.

The tool asks a short series of questions, clones the template, rewrites its
``package.json``, installs dependencies and finally repoints the git remote
and prunes branches.
"""

__version__ = "1.0.0"
