from datetime import date

from field_validator import parse_amount, parse_date
from form_state import FIELD_AMOUNT, FIELD_CATEGORY, FIELD_DATE, FIELD_DESCRIPTION
from logging_setup import get_logger
from transaction import EXPENSES, FALLBACK_CATEGORY, Transaction


log = get_logger("fintrackr.submission")


def resolve_category(text: str, known) -> str:
    wanted = text.strip()
    for name in known:
        if name.strip() == wanted:
            return name
    return FALLBACK_CATEGORY


def submit_transaction(state, today=None) -> Transaction | None:
    """Validate the form and persist the transaction it describes.

    Returns the new transaction, or None when a touched field is invalid.
    The store write happens before the working copy is touched, so a
    ``StoreError`` leaves both sides unchanged and propagates to the caller.
    """
    bucket = state.bucket
    if bucket is None:
        raise ValueError(f"cannot submit from the {state.current_tab.title} tab")

    form = state.form
    if not form.validate_all():
        log.debug("submission blocked by invalid fields")
        return None

    amount_text = form.text(FIELD_AMOUNT)
    date_text = form.text(FIELD_DATE)

    # untouched fields are skipped by validation, so blanks get defaults
    amount = parse_amount(amount_text) if amount_text else 0.0
    if bucket == EXPENSES:
        amount = -amount
    # a zero amount is stored as 0.0, never -0.0
    amount = amount or 0.0
    when = parse_date(date_text) if date_text else (today or date.today())

    category = resolve_category(
        form.text(FIELD_CATEGORY), state.data.categories(bucket)
    )
    target = state.data.bucket(bucket)
    transaction = Transaction(
        id=len(target) + 1,
        amount=amount,
        category=category,
        date=when,
        description=form.text(FIELD_DESCRIPTION),
    )

    state.store.append(transaction, bucket)
    target.append(transaction)
    log.info("added %s #%d (%.2f, %s)", bucket, transaction.id, amount, category)
    return transaction
