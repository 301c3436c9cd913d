"""
SplitEase - Shared Expense Payment Tracker

splitease settle --total 300 --members members.csv --payments payments.csv
splitease settle --total 300 --members members.csv --payments payments.csv --admin alice
splitease split --total 90 --members members.csv --select alice bob
splitease settle ... --interactive       # Record payments from the menu
"""

import sys
import argparse

from cli_interface import SplitEaseCLI
from config import APP_NAME, CURRENCY_SYMBOL, EXPORT_DIR
from constants import REMINDER_CHANNELS
from data_models import SplitMember
from errors import InvalidInputError, SplitEaseError
from payment_ledger import load_members_csv, load_payments_csv
from split_allocator import equal_split
from utils import quantize_amount, to_non_negative_decimal


def _find_member(participants, participant_id: str):
    for participant in participants:
        if participant.id == participant_id:
            return participant
    raise InvalidInputError(f"Unknown member: {participant_id}", participant_count=len(participants))


def run_split(args):
    """Equal split of a new expense"""
    participants = load_members_csv(args.members)
    selected_ids = set(args.select or [p.id for p in participants])

    unknown = selected_ids - {p.id for p in participants}
    if unknown:
        raise InvalidInputError(f"Unknown member(s): {', '.join(sorted(unknown))}")

    members = [SplitMember(participant=p, selected=p.id in selected_ids) for p in participants]
    allocations = equal_split(args.total, members)

    print(f"\n🧾 Splitting {CURRENCY_SYMBOL}{quantize_amount(to_non_negative_decimal(args.total))} "
          f"between {len(allocations)} member(s)")
    for allocation in allocations:
        print(f"  {allocation.participant.name:15} : {CURRENCY_SYMBOL}{quantize_amount(allocation.amount)}")


def run_settle(args):
    """Balances, reminders and export for an expense"""
    participants = load_members_csv(args.members)
    payments = load_payments_csv(args.payments) if args.payments else []
    admin = _find_member(participants, args.admin) if args.admin else None

    cli = SplitEaseCLI(
        total=to_non_negative_decimal(args.total, "total"),
        participants=participants,
        payments=payments,
        admin=admin,
        expense_title=args.title,
        group_name=args.group,
    )

    if args.interactive:
        cli.run()
        return

    cli.display_banner()
    cli.display_summary()
    cli.display_balances()

    if args.reminders:
        cli.display_reminders(args.reminders)

    if args.export:
        cli.export_results(args.export_dir)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='splitease',
        description=f'{APP_NAME} - Shared expense payment tracker',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  splitease split --total 90 --members members.csv
  splitease settle --total 300 --members members.csv --payments payments.csv --reminders email
  splitease settle --total 300 --members members.csv --payments payments.csv --admin alice --export
        """
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'{APP_NAME} 1.0'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    split = subparsers.add_parser('split', help='Split a new expense equally')
    split.add_argument('--total', required=True, help='Expense total')
    split.add_argument('--members', required=True, help='Members CSV (id,name,email,phone)')
    split.add_argument('--select', nargs='+', help='Member ids to split with (default: everyone)')
    split.set_defaults(handler=run_split)

    settle = subparsers.add_parser('settle', help='Show who owes what for an expense')
    settle.add_argument('--total', required=True, help='Expense total')
    settle.add_argument('--members', required=True, help='Members CSV (id,name,email,phone)')
    settle.add_argument('--payments', help='Payments CSV (participant_id,amount,method,notes)')
    settle.add_argument('--admin', help='Id of the member who fronted the whole bill')
    settle.add_argument('--title', default='Expense', help='Expense title used in reminders')
    settle.add_argument('--group', default='Group', help='Group name used in reminders')
    settle.add_argument('--reminders', choices=REMINDER_CHANNELS, help='Prepare reminders for this channel')
    settle.add_argument('--export', action='store_true', help='Export results to JSON')
    settle.add_argument('--export-dir', default=EXPORT_DIR, help='Directory for JSON exports')
    settle.add_argument('--interactive', action='store_true', help='Open the interactive menu')
    settle.set_defaults(handler=run_settle)

    return parser


def main(argv=None):
    """Main entry point"""
    args = build_parser().parse_args(argv)

    try:
        args.handler(args)
    except SplitEaseError as e:
        print(f"❌ {e}")
        return 1
    except FileNotFoundError as e:
        print(f"❌ File not found: {e.filename or e}")
        return 1
    except KeyboardInterrupt:
        print("\n\n👋 Goodbye!")
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
