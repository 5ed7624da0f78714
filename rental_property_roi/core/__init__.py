from .amortization import amort_schedule, aggregate_yearly, fixed_monthly_payment, remaining_balance, summarize
from .down_payment import DownPayment, normalize
from .errors import InvalidInput
from .expenses import expense_breakdown, income_breakdown, monthly_operating_expenses
from .insights import investment_insights, investment_summary
from .model import InputSet, ResultSet, RentalPropertyModel, compute
from .projections import CashFlowYear, appreciation_estimate, generate_cash_flow_schedule, schedule_frame
from .utils import currency, percent, grow

__all__ = [
	"amort_schedule",
	"aggregate_yearly",
	"fixed_monthly_payment",
	"remaining_balance",
	"summarize",
	"DownPayment",
	"normalize",
	"InvalidInput",
	"expense_breakdown",
	"income_breakdown",
	"monthly_operating_expenses",
	"investment_insights",
	"investment_summary",
	"InputSet",
	"ResultSet",
	"RentalPropertyModel",
	"compute",
	"CashFlowYear",
	"appreciation_estimate",
	"generate_cash_flow_schedule",
	"schedule_frame",
	"currency",
	"percent",
	"grow",
]
