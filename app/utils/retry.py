# app/utils/retry.py
from kombu.exceptions import OperationalError as BrokerError
from tenacity import retry, stop_after_attempt, wait_exponential, retry_if_exception_type


def broker_retry():
    # publish do brokera celery, tylko bledy polaczenia
    return retry(
        reraise=True,
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.2, min=0.2, max=2),
        retry=retry_if_exception_type(BrokerError),
    )
