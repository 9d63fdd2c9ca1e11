from ngrammer.ngrams import NGrams, WindowState, ngrams
from ngrammer.padding import Padded, PadPolicy, PadSide, WORD_SEP, register_pad_defaults
