"""cvs-tag: tag CVS sources after a successful build.

The tag name comes from a template evaluated against the build environment;
the tag is applied with `cvs tag` (branch configured) or `cvs rtag` (by date).
"""
