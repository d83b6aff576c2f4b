import sys

from git_profiles.cli import main

sys.exit(main())
