import sys

from vmstarter.run import main


if __name__ == '__main__':
  sys.exit(main())
