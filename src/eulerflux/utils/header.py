import textwrap

def write_header(s, name):
    '''Writes a section title underlined to the full line width.'''
    underline = '-'*len(name)
    s.write(f'{name}\n{underline}\n')

def write_field(s, label, value, indent=2, width=20):
    '''Writes one aligned "label : value" line.'''
    s.write(f'{" "*indent}{label:<{width}}: {value}\n')

def wrap(s, indent=0, width=80):
    '''Format a string or list of strings into an indented paragraph.'''

    if not isinstance(s,str):
        s = ' '.join(s)

    return textwrap.fill(s.strip(),
        width = width,
        initial_indent = ' '*indent,
        subsequent_indent = ' '*indent,
        replace_whitespace = True,
    )
