import hypothesis.strategies as st

from _credini.section import Section

# Printable ascii without space and the characters delimiting tokens
word_characters = "".join(
    chr(c) for c in range(33, 127) if chr(c) not in "[]="
)

words = st.text(alphabet=word_characters, min_size=1, max_size=20)

values = st.text(alphabet=word_characters, max_size=40)

sections = st.builds(Section, words, st.dictionaries(words, values, max_size=5))

section_lists = st.lists(sections, max_size=5)

whitespace = st.text(alphabet=" \t", max_size=3)
