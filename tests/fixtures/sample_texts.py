"""Наборы французских текстов для тестирования.

Содержит простые и сложные примеры, а также HTML-текст для проверки извлечения.
"""

SAMPLE_SIMPLE_TEXT = "Le chat mange. Le chat dort."


# Токены после фильтра: l'été x2, enfants x2, остальные по одному (12 слов из 18 токенов)
SAMPLE_COMPLEX_TEXT = """
L'été dernier, à Paris, les enfants jouaient dans le jardin.
Aujourd'hui, l'ÉTÉ est revenu : les enfants jouent encore !
""".strip()


SAMPLE_HTML_TEXT = """
<html>
  <head><style>p { color: red; }</style></head>
  <body>
    <p>Le chat mange.</p>
    <p>Le <strong>chat</strong> dort.</p>
    <script>var chat = 1;</script>
  </body>
</html>
""".strip()


SAMPLE_NUMBERS_TEXT = "12 34 12"
