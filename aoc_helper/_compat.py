import sys

# same-name imports tell the type checker these are re-exported for other modules
if sys.version_info >= (3, 11):
    import tomllib as tomllib
    from typing import Self as Self
else:
    import tomli as tomllib
    from typing_extensions import Self as Self
