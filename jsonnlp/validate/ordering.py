"""
Token Order Validator — Token ids and character offsets follow the text.
"""

from jsonnlp.core.contracts import Validator
from jsonnlp.model.schema import Corpus, Token


def _has_offsets(token: Token) -> bool:
    return token.char_offset_begin > 0 or token.char_offset_end > 0


class TokenOrderValidator(Validator):
    """
    Validates token ordering within each document.

    Checks:
    - Token ids are unique and strictly increasing
    - begin <= end for every token carrying offsets
    - Offsets are non-decreasing and tokens do not overlap
    """

    @property
    def name(self) -> str:
        return "token_order"

    def validate(self, corpus: Corpus) -> list[str]:
        errors: list[str] = []

        for doc in corpus.documents:
            prefix = f"Document {doc.id}"
            previous = None
            last_with_offsets = None

            for token in doc.tokens:
                if previous is not None:
                    if token.id == previous.id:
                        errors.append(f"{prefix}: token id {token.id} is duplicated")
                    elif token.id < previous.id:
                        errors.append(
                            f"{prefix}: token {token.id} follows token {previous.id} out of order"
                        )
                previous = token

                if not _has_offsets(token):
                    continue

                if token.char_offset_begin > token.char_offset_end:
                    errors.append(
                        f"{prefix}: token {token.id} ends before it begins "
                        f"({token.char_offset_begin} > {token.char_offset_end})"
                    )
                if (
                    last_with_offsets is not None
                    and token.char_offset_begin < last_with_offsets.char_offset_end
                ):
                    errors.append(
                        f"{prefix}: token {token.id} at offset {token.char_offset_begin} "
                        f"overlaps token {last_with_offsets.id} ending at "
                        f"{last_with_offsets.char_offset_end}"
                    )
                last_with_offsets = token

        return errors
