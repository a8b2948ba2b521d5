"""
Французский список стоп-слов по умолчанию.

Разделён на два множества:
- NUMERIC_STOPWORDS - числовые токены "0".."334" (номера страниц, глав и т.п.)
- LEXICAL_STOPWORDS - артикли, местоимения, предлоги и частые служебные слова

Лексический список сохранён дословно, включая повторы ('ces', 'leurs',
'on', 'dit') и отдельный токен '-': повторы поглощаются при построении
множества, исправления не вносятся.
"""

NUMERIC_STOPWORDS_LAST = 334

NUMERIC_STOPWORDS = tuple(str(number) for number in range(NUMERIC_STOPWORDS_LAST + 1))

LEXICAL_STOPWORDS = (
    'le', 'la', 'les', 'de', 'des', 'du', 'un', 'une', 'et', 'en', 'dans', 'que', 'qui', 'pour', 'par', 'a', 'au', 'aux',
    'ce', 'ces', 'se', 'sa', 'son', 'ses', 'sur', 'avec', 'sans', 'ne', 'pas', 'plus', 'ou', 'où', 'comme', 'mais',
    'on', 'il', 'elle', 'ils', 'elles', 'nous', 'vous', 'leur', 'leurs', 'y', 'à', 'd', 'l', 'c', 'j', 'm', 't', 'qu',
    'aujourd', 'hui', 'été', 'être', 'fait', 'faire', 'dont', 'sera', 'ainsi', 'tout', 'tous', 'chaque',
    'moins', 'même', 'autre', 'peut', 'sont', 'sous', 'entre', 'vers', 'après', 'avant', 'pendant',
    'si', 'donc', 'car', 'cela', 'cet', 'cette', 'ces', 'vos', 'mes', 'tes', 'nos', 'leurs', 'ta', 'ma', 'mon',
    'est', 'ceux', 'n', 'lui', 's', 'tu', 'on', 'ont', 'avons', 'je', 'alors', 'quand', 'certes', 'là', 'puis', 'votre', 'celui', 'celle',
    'dit', 'ton', 'ni', 'toi', 'moi', 'voilà', 'te', 'point', 'seront', 'très', 'afin', 'deux', 'croient', 'notre', 'dire', 'avez', 'descendre', 'part',
    'non', 'rien', 'auront', 'auprès', 'ô', 'e', 'aussi', 'ayant', 'était', 'eux', 'disant', 'ai', 'étant', 'étaient', 'suis', 'selon', 'dit', 'toute', 'toutes', 'chapitre', 'fut', 'v', 'choses', 'chose', "c'est", 'dès', 'hors', 'quelles', 'quels', 'laquelle', 'lequel', 'lesquelles', 'lesquels', 'lorsque', "lorsqu'", 'quelque', 'quelques', '-', "qu'il", 'me', 'avait', 'devant', 'contre',
)

DEFAULT_STOPWORDS = NUMERIC_STOPWORDS + LEXICAL_STOPWORDS
