"""
ncrconv.loaders - conversion table file readers

(c) 2024 the ncrconv authors
licence: https://opensource.org/licenses/MIT
"""

import logging


# registry of table file format readers
table_readers = {}

def register_reader(format, **default_kwargs):
    """Decorator to register table file reader."""
    def decorator(reader):
        table_readers[format] = (reader, default_kwargs)
        return reader
    return decorator


def _parse_number(text, base):
    """Parse a byte or codepoint column, allowing U+ and 0x prefixes."""
    text = text.strip()
    if text.upper().startswith('U+'):
        text = text[2:]
    return int(text, base)


@register_reader('txt')
@register_reader('map')
@register_reader('translit', separator='\t', value_base=None, inline_comments=False)
def _from_text_columns(
        data, *, comment='#', separator=None, key_column=0, value_column=1,
        key_base=16, value_base=16, inline_comments=True, ignore_errors=False,
    ):
    """
    Extract table from text columns in file data (as bytes).

    value_base: base of the value column, or None if the value column holds
                replacement text that runs to the end of the line
    """
    mapping = {}
    for line in data.decode('utf-8-sig').splitlines():
        # ignore empty lines and comment lines (first char is #)
        if (not line) or (line[0] == comment):
            continue
        # strip off comments
        if inline_comments:
            line = line.split(comment)[0]
        if value_base is None:
            # replacement text may contain the separator; keep it whole
            splitline = line.split(separator, value_column)
        else:
            splitline = line.split(separator)
        if len(splitline) <= max(key_column, value_column):
            # undefined positions have no value column
            continue
        key_str, value_str = splitline[key_column], splitline[value_column]
        try:
            key = _parse_number(key_str, key_base)
            if value_base is None:
                value = value_str
            else:
                value = _parse_number(value_str, value_base)
        except (ValueError, TypeError) as e:
            # ignore malformed lines
            if not ignore_errors:
                logging.warning('Could not parse line in table file: %s [%s]', e, repr(line))
            continue
        if value != 0xFFFD:
            # u+FFFD replacement character is used to mark undefined code points
            mapping[key] = value
    return mapping
