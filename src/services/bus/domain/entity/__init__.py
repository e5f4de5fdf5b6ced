from .bus import Bus as Bus
