from collections.abc import Callable
import random

import pytest

ALICE_TEXT = (
    "Alice was beginning to get very tired of sitting by her sister on the "
    "bank, and of having nothing to do: once or twice she had peeped into "
    "the book her sister was reading, but it had no pictures or "
    "conversations in it, 'and what is the use of a book,' thought Alice "
    "'without pictures or  conversations?'\n\nSo she was considering in "
    "her own mind (as well as she could, for the hot day made her feel "
    "very sleepy and stupid), whether the pleasure of making a daisy-chain "
    "would be worth the trouble of getting up and picking the daisies, "
    "when suddenly a White Rabbit with pink eyes ran close by "
    "her.\n\nThere was nothing so VERY remarkable in that; nor did Alice "
    "think it so VERY much out of the way to hear the Rabbit say to "
    "itself, 'Oh dear! Oh dear! I shall be late!' (when she thought it "
    "over afterwards, it occurred to her that she ought to have wondered "
    "at this, but at the time it all seemed quite natural); but when the "
    "Rabbit actually TOOK A WATCH OUT OF ITS WAISTCOAT-POCKET, and looked "
    "at it, and then hurried on, Alice started to her feet, for it flashed "
    "across her mind that she had never before seen a rabbit with either a "
    "waistcoat-pocket, or a watch to take out of it, and burning with "
    "curiosity, she ran across the field after it, and fortunately was "
    "just in time to see it pop down a large rabbit-hole under the "
    "hedge.\nIn another moment down went Alice after it, never once "
    "considering how in the world she was to get out again.\n\nThe "
    "rabbit-hole went straight on like a tunnel for some way, and then  "
    "dipped suddenly down, so suddenly that Alice had not a moment to "
    "think about stopping herself before she found herself falling down a "
    "very deep well.\n\nEither the well was very deep, or she fell very "
    "slowly, for she had plenty of time as she went down to look about her "
    "and to wonder what was going to happen next. First, she tried to look "
    "down and make out what she was coming to, but it was too dark to see "
    "anything; then she looked at the sides of the well, and noticed that "
    "they were filled with cupboards and book-shelves; here and there she "
    "saw maps and pictures hung upon pegs. She took down a jar from one of "
    "the shelves as she passed; it was labelled 'ORANGE MARMALADE', but to "
    "her great disappointment it was empty: she did not like to drop the "
    "jar for fear of killing somebody, so managed to put it into one of "
    "the cupboards as she fell past it.\n\n'Well!' thought Alice to "
    "herself, 'after such a fall as this, I shall think nothing of "
    "tumbling down stairs! How brave they'll all think me at home! Why, I "
    "wouldn't say anything about it, even if I fell off the top of the "
    "house!' (Which was very likely true.)"
)

ALICE_WRAPPED_60 = (
    "Alice was beginning to get very tired of sitting by her\n"
    "sister on the bank, and of having nothing to do: once or\n"
    "twice she had peeped into the book her sister was reading,\n"
    "but it had no pictures or conversations in it, 'and what is\n"
    "the use of a book,' thought Alice 'without pictures or \n"
    "conversations?'\n"
    "\n"
    "So she was considering in her own mind (as well as she\n"
    "could, for the hot day made her feel very sleepy and\n"
    "stupid), whether the pleasure of making a daisy-chain would\n"
    "be worth the trouble of getting up and picking the daisies,\n"
    "when suddenly a White Rabbit with pink eyes ran close by\n"
    "her.\n"
    "\n"
    "There was nothing so VERY remarkable in that; nor did\n"
    "Alice think it so VERY much out of the way to hear the\n"
    "Rabbit say to itself, 'Oh dear! Oh dear! I shall be late!'\n"
    "(when she thought it over afterwards, it occurred to her\n"
    "that she ought to have wondered at this, but at the time it\n"
    "all seemed quite natural); but when the Rabbit actually\n"
    "TOOK A WATCH OUT OF ITS WAISTCOAT-POCKET, and looked at it,\n"
    "and then hurried on, Alice started to her feet, for it\n"
    "flashed across her mind that she had never before seen a\n"
    "rabbit with either a waistcoat-pocket, or a watch to take\n"
    "out of it, and burning with curiosity, she ran across the\n"
    "field after it, and fortunately was just in time to see it\n"
    "pop down a large rabbit-hole under the hedge.\n"
    "In another moment down went Alice after it, never once\n"
    "considering how in the world she was to get out again.\n"
    "\n"
    "The rabbit-hole went straight on like a tunnel for some\n"
    "way, and then  dipped suddenly down, so suddenly that Alice\n"
    "had not a moment to think about stopping herself before she\n"
    "found herself falling down a very deep well.\n"
    "\n"
    "Either the well was very deep, or she fell very slowly,\n"
    "for she had plenty of time as she went down to look about\n"
    "her and to wonder what was going to happen next. First, she\n"
    "tried to look down and make out what she was coming to, but\n"
    "it was too dark to see anything; then she looked at the\n"
    "sides of the well, and noticed that they were filled with\n"
    "cupboards and book-shelves; here and there she saw maps and\n"
    "pictures hung upon pegs. She took down a jar from one of\n"
    "the shelves as she passed; it was labelled 'ORANGE\n"
    "MARMALADE', but to her great disappointment it was empty:\n"
    "she did not like to drop the jar for fear of killing\n"
    "somebody, so managed to put it into one of the cupboards as\n"
    "she fell past it.\n"
    "\n"
    "'Well!' thought Alice to herself, 'after such a fall as\n"
    "this, I shall think nothing of tumbling down stairs! How\n"
    "brave they'll all think me at home! Why, I wouldn't say\n"
    "anything about it, even if I fell off the top of the\n"
    "house!' (Which was very likely true.)"
)


@pytest.fixture
def random_bytes() -> Callable[[int], bytes]:
    """Return a factory producing reproducible random byte strings."""
    rng = random.Random(1234)

    def _make(size: int) -> bytes:
        return bytes(rng.randrange(256) for _ in range(size))

    return _make


@pytest.fixture
def alice_text() -> str:
    return ALICE_TEXT


@pytest.fixture
def alice_wrapped_60() -> str:
    return ALICE_WRAPPED_60
