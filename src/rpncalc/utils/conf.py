import sys

from rpncalc.utils._conf import ConfMod

# The module replaces itself with a ConfMod instance, so that
#   from rpncalc.utils import conf
#   conf.get("output", "result_prefix")
# works without creating an instance first.
sys.modules[__name__] = ConfMod(__name__)
