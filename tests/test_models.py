"""Tests for domain models."""

import logging
from dataclasses import FrozenInstanceError
from decimal import Decimal

import pytest

from bank_classes.exceptions import InvalidAmountError
from bank_classes.models import Person, Student
from bank_classes.models.banking import (
    DEFAULT_CUSTOMER_ID,
    BankAccount,
    BankCustomer,
    to_amount,
)


class TestBankCustomer:
    """Tests for BankCustomer model."""

    def test_default_constructor(self) -> None:
        customer = BankCustomer()

        assert customer.first_name == "Tim"
        assert customer.last_name == "Shao"
        assert customer.customer_id == "1010101010"

    def test_two_argument_constructor_uses_default_id(self) -> None:
        customer = BankCustomer("Grace", "Hopper")

        assert customer.first_name == "Grace"
        assert customer.last_name == "Hopper"
        assert customer.customer_id == DEFAULT_CUSTOMER_ID == "1010101010"

    def test_three_argument_constructor(self) -> None:
        customer = BankCustomer("Grace", "Hopper", "  id-007 ")

        assert customer.customer_id == "  id-007 "  # stored without normalization

    def test_keyword_construction(self) -> None:
        customer = BankCustomer(first_name="Alan", last_name="Turing", customer_id="42")

        assert customer == BankCustomer("Alan", "Turing", "42")

    def test_empty_values_accepted(self) -> None:
        customer = BankCustomer("", "", "")

        assert customer.first_name == ""
        assert customer.customer_id == ""

    def test_fields_are_read_only(self) -> None:
        customer = BankCustomer()

        with pytest.raises(FrozenInstanceError):
            customer.first_name = "Other"  # type: ignore[misc]

    def test_full_name(self) -> None:
        assert BankCustomer("Tim", "Shao").full_name == "Tim Shao"


class TestToAmount:
    """Tests for amount conversion."""

    def test_decimal_passthrough(self) -> None:
        value = Decimal("12.34")
        assert to_amount(value) is value

    def test_int(self) -> None:
        assert to_amount(500) == Decimal("500")

    def test_float_has_no_binary_error(self) -> None:
        assert to_amount(0.1) == Decimal("0.1")

    def test_string(self) -> None:
        assert to_amount("-20.50") == Decimal("-20.50")

    def test_invalid_string(self) -> None:
        with pytest.raises(InvalidAmountError):
            to_amount("ten")

    @pytest.mark.parametrize(
        "value", ["NaN", "nan", "Infinity", "-inf", "sNaN", float("nan"), float("inf"), Decimal("NaN")]
    )
    def test_non_finite_rejected(self, value: object) -> None:
        with pytest.raises(InvalidAmountError, match="finite"):
            to_amount(value)  # type: ignore[arg-type]

    @pytest.mark.parametrize("value", [None, True, [1]])
    def test_unsupported_type(self, value: object) -> None:
        with pytest.raises(TypeError):
            to_amount(value)  # type: ignore[arg-type]


class TestBankAccount:
    """Tests for BankAccount model."""

    def test_account_creation(self, sample_customer: BankCustomer) -> None:
        account = BankAccount(sample_customer, Decimal("1000"))

        assert account.customer is sample_customer
        assert account.balance == Decimal("1000")
        assert isinstance(account.balance, Decimal)

    def test_negative_opening_balance_accepted(self, sample_customer: BankCustomer) -> None:
        account = BankAccount(sample_customer, -50)

        assert account.balance == Decimal("-50")

    def test_balance_is_read_only(self, sample_account: BankAccount) -> None:
        with pytest.raises(AttributeError):
            sample_account.balance = Decimal("1")  # type: ignore[misc]

    @pytest.mark.parametrize("amount", ["0", "250.75", "-300"])
    def test_deposit_adds_amount(self, sample_account: BankAccount, amount: str) -> None:
        sample_account.deposit(Decimal(amount))

        assert sample_account.balance == Decimal("1000") + Decimal(amount)

    @pytest.mark.parametrize("amount", ["0", "250.75", "-300"])
    def test_withdraw_subtracts_amount(self, sample_account: BankAccount, amount: str) -> None:
        sample_account.withdraw(Decimal(amount))

        assert sample_account.balance == Decimal("1000") - Decimal(amount)

    def test_operations_return_none(self, sample_account: BankAccount) -> None:
        assert sample_account.deposit(1) is None
        assert sample_account.withdraw(1) is None

    def test_withdraw_beyond_balance_goes_negative(self, sample_account: BankAccount) -> None:
        sample_account.withdraw(Decimal("1500.25"))

        assert sample_account.balance == Decimal("-500.25")

    def test_overdraft_logs_warning(
        self, sample_account: BankAccount, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="bank_classes"):
            sample_account.withdraw(2000)

        assert "overdrawn" in caplog.text
        assert sample_account.balance == Decimal("-1000")

    def test_mutations_log_debug(
        self, sample_account: BankAccount, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="bank_classes"):
            sample_account.deposit(5)

        assert "Deposit 5 for customer cust-test-001, balance 1005" in caplog.text

    def test_classroom_sequence(self) -> None:
        account = BankAccount(BankCustomer("Tim", "Shao"), 1000)

        account.deposit(500)
        assert account.balance == Decimal("1500")

        account.withdraw(200)
        assert account.balance == Decimal("1300")
        assert str(account.balance) == "1300"

    def test_decimal_arithmetic_is_exact(self, sample_customer: BankCustomer) -> None:
        account = BankAccount(sample_customer, 0)

        for _ in range(10):
            account.deposit(0.1)

        assert account.balance == Decimal("1.0")

    def test_customer_shared_between_accounts(self, sample_customer: BankCustomer) -> None:
        first = BankAccount(sample_customer, 10)
        second = BankAccount(sample_customer, 20)

        first.deposit(5)

        assert first.customer is second.customer
        assert second.balance == Decimal("20")

    def test_non_finite_amounts_leave_balance_unchanged(self, sample_account: BankAccount) -> None:
        with pytest.raises(InvalidAmountError):
            sample_account.deposit("NaN")
        with pytest.raises(InvalidAmountError):
            sample_account.withdraw("Infinity")

        assert sample_account.balance == Decimal("1000")

    def test_non_finite_opening_balance_rejected(self, sample_customer: BankCustomer) -> None:
        with pytest.raises(InvalidAmountError):
            BankAccount(sample_customer, "Infinity")

    def test_log_records_carry_account_fields(
        self, sample_account: BankAccount, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="bank_classes"):
            sample_account.withdraw(Decimal("1500"))

        debug_record, warning_record = caplog.records
        assert debug_record.customer_id == "cust-test-001"
        assert debug_record.change == Decimal("-1500")
        assert debug_record.balance == Decimal("-500")
        assert warning_record.levelno == logging.WARNING
        assert warning_record.balance == Decimal("-500")
        assert not hasattr(warning_record, "change")

    def test_repr(self, sample_account: BankAccount) -> None:
        assert "balance=Decimal('1000')" in repr(sample_account)


class TestStudent:
    """Tests for the Person interface and Student."""

    def test_person_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            Person()  # type: ignore[abstract]

    def test_student_is_person(self) -> None:
        assert isinstance(Student(), Person)

    def test_student_defaults(self) -> None:
        student = Student()

        assert student.name == ""
        assert student.age == 0

    def test_describe(self) -> None:
        assert Student(name="Ann", age=20).describe() == "Student Name: Ann, Age: 20"

    def test_display_info(self, capsys: pytest.CaptureFixture) -> None:
        Student(name="Ann", age=20).display_info()

        assert capsys.readouterr().out == "Student Name: Ann, Age: 20\n"

    def test_student_is_mutable(self) -> None:
        student = Student(name="Ann", age=20)
        student.age = 21

        assert student.describe() == "Student Name: Ann, Age: 21"
