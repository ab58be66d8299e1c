from .exception import ValidateMxException, InvArgException, ChecksumInvariantError
from .normalizer import normalize
from .fileio import openfile
