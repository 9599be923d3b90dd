from .classpath import classpath
from .config import config
from .doctor import doctor
from .locate import locate
from .log import log
from .version import version
