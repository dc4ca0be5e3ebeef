from .language_tables import LanguageTables


DE = LanguageTables(
    labels={
        '_wpg': 'Seite',
        '_txt': 'Text',
        '_cod': 'Quellcode',
        '_boo': 'Wahrheitswert',
        '_num': 'Zahl',
        '_geo': 'Geografische Koordinaten',
        '_tem': 'Temperatur',
        '_dat': 'Datum',
        '_ema': 'E-Mail',
        '_uri': 'URL',
        '_anu': 'URI der Annotation',
        '_tel': 'Telefonnummer',
        '_rec': 'Verbund',
        '_qty': 'Maß',
    },
    aliases={
        'URI': '_uri',
        'Ganze Zahl': '_num',
        'Dezimalzahl': '_num',
        'Aufzählung': '_txt',
        'Zeichenkette': '_txt',
        'Geografische Koordinate': '_geo',
    },
)
