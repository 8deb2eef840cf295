"""
Logging setup and diagnostic logging for resolved stacks.
"""
import logging

from stackref.report import get_all_unresolved_refs, iter_owned_refs, is_unresolved_reference

logger = logging.getLogger(__name__)


def configure_logging(verbose):
    if verbose:
        if verbose > 1:
            logging.basicConfig(level=logging.DEBUG)
        else:
            logging.basicConfig(level=logging.INFO)


def log_resolution_summary(stack_ref):
    """
    Log whether the stack resolved, and one warning per ref that did not: both
    references that could not be resolved and values that were absent or of an
    unsupported type. Returns the number of unresolved references.
    """
    unresolved = get_all_unresolved_refs(stack_ref)
    logger.info("Stack %s (%s): %d member(s), resolved: %s, unresolved references: %d",
                stack_ref.name, stack_ref.id, len(stack_ref.members), stack_ref.resolved, len(unresolved))

    for owner, label, ref in iter_owned_refs(stack_ref):
        if is_unresolved_reference(ref):
            logger.warning("%s - %s(%s): %s could not be resolved", owner, ref.name, label, ref.raw_reference)
        elif not ref.resolved:
            logger.warning("%s - %s(%s): has no usable value", owner, ref.name, label)

    return len(unresolved)


def configure_from_config(stackref_config):
    """Apply the logging and resolver debug settings of a StackRefConfig."""
    configure_logging(stackref_config.logging_verbosity())
    stackref_config.debug_backend()
