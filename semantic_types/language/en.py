from .language_tables import LanguageTables


EN = LanguageTables(
    labels={
        '_wpg': 'Page',
        '_txt': 'Text',
        '_cod': 'Code',
        '_boo': 'Boolean',
        '_num': 'Number',
        '_geo': 'Geographic coordinate',
        '_tem': 'Temperature',
        '_dat': 'Date',
        '_ema': 'Email',
        '_uri': 'URL',
        '_anu': 'Annotation URI',
        '_tel': 'Telephone number',
        '_rec': 'Record',
        '_qty': 'Quantity',
    },
    aliases={
        'URI': '_uri',
        'Float': '_num',
        'Integer': '_num',
        'Enumeration': '_txt',
        'String': '_txt',
        'Phone number': '_tel',
        'E-mail': '_ema',
        'Geographic coordinates': '_geo',
        'Geographic polygon': '_gpo',
    },
)
