"""
Loan amortization calculations for elder-care planning.

This module provides the fixed-rate amortization formulas used for every loan
in a projection: existing mortgages, other household debt, casita financing
and the new-home mortgage. Rates are annual percentages (6.5 for 6.5%).
"""

from pydantic import BaseModel, ConfigDict, Field


class LoanCalculator:
    """Calculator for fixed-rate loan payments and balances."""

    @staticmethod
    def calculate_monthly_payment(
        principal: float, annual_rate_percent: float, term_years: int
    ) -> float:
        """
        Calculate the monthly payment using the standard amortization formula.

        Interest-free and zero-term loans are not amortized and carry no payment.

        Args:
            principal: Loan principal amount
            annual_rate_percent: Annual interest rate as a percentage
            term_years: Loan term in years

        Returns:
            Monthly payment amount
        """
        if principal <= 0 or term_years <= 0 or annual_rate_percent <= 0:
            return 0.0

        monthly_rate = annual_rate_percent / 100 / 12
        num_payments = term_years * 12
        growth = (1 + monthly_rate) ** num_payments

        return principal * (monthly_rate * growth) / (growth - 1)

    @staticmethod
    def calculate_remaining_balance(
        principal: float,
        annual_rate_percent: float,
        term_years: int,
        months_elapsed: int,
    ) -> float:
        """
        Calculate the outstanding balance after a number of payments.

        Args:
            principal: Original loan principal
            annual_rate_percent: Annual interest rate as a percentage
            term_years: Loan term in years
            months_elapsed: Number of monthly payments made since origination

        Returns:
            Remaining balance (0 once the loan is retired)
        """
        if principal <= 0 or term_years <= 0 or months_elapsed <= 0:
            return principal
        if months_elapsed >= term_years * 12:
            return 0.0
        if annual_rate_percent <= 0:
            # Non-amortizing: nothing is paid down before term.
            return principal

        monthly_rate = annual_rate_percent / 100 / 12
        payment = LoanCalculator.calculate_monthly_payment(
            principal, annual_rate_percent, term_years
        )
        growth = (1 + monthly_rate) ** months_elapsed

        return principal * growth - payment * (growth - 1) / monthly_rate

    @staticmethod
    def calculate_total_interest(
        principal: float, annual_rate_percent: float, term_years: int
    ) -> float:
        """Total interest paid over the full life of the loan."""
        payment = LoanCalculator.calculate_monthly_payment(
            principal, annual_rate_percent, term_years
        )
        if payment == 0:
            return 0.0
        return payment * term_years * 12 - principal


class LoanTerms(BaseModel):
    """Origination terms of a loan, fixed for the life of a projection."""

    model_config = ConfigDict(frozen=True)

    principal: float = Field(..., description="Original loan principal")
    annual_rate_percent: float = Field(
        default=0, ge=0, description="Annual interest rate (percent)"
    )
    term_years: int = Field(default=0, ge=0, description="Loan term in years")

    def monthly_payment(self) -> float:
        """Scheduled monthly payment for these terms."""
        return LoanCalculator.calculate_monthly_payment(
            self.principal, self.annual_rate_percent, self.term_years
        )

    def remaining_balance(self, months_elapsed: int) -> float:
        """Balance recomputed from origination after `months_elapsed` payments."""
        return LoanCalculator.calculate_remaining_balance(
            self.principal, self.annual_rate_percent, self.term_years, months_elapsed
        )
