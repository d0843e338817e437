from typing import Generic, TypeVar, Union

from pydantic import BaseModel, ValidationError

from card_ssr.exceptions import DecodeError

T = TypeVar("T")


class AnswerOk(BaseModel, Generic[T]):
    ok: bool
    result: T


class AnswerError(BaseModel):
    ok: bool
    error: str


def parse_answer(
    body: bytes | str, payload_type: type[T]
) -> Union[AnswerOk[T], AnswerError]:
    """Decode a backend envelope, trying the success shape before the error one."""
    try:
        return AnswerOk[payload_type].model_validate_json(body)
    except ValidationError as ok_exc:
        try:
            return AnswerError.model_validate_json(body)
        except ValidationError:
            raise DecodeError(f"Unexpected backend answer: {ok_exc}") from ok_exc
